# nmea0183

Parsers for the data part of NMEA 0183 sentences, the line-oriented format
spoken by GPS/GNSS receivers, echo sounders, weather stations, radars and
other marine instruments.

The package uses only the standard library.

## Supported sentences

| Sentence | Meaning                                   | Module              | Parser        |
|----------|-------------------------------------------|---------------------|---------------|
| GSA      | GNSS DOP and active satellites            | `nmea0183.gsa`      | `parse_gsa`   |
| GST      | Pseudorange noise statistics              | `nmea0183.gst`      | `parse_gst`   |
| GSV      | Satellites in view                        | `nmea0183.gsv`      | `parse_gsv`   |
| HDT      | Heading, true                             | `nmea0183.hdt`      | `parse_hdt`   |
| MDA      | Meteorological composite                  | `nmea0183.mda`      | `parse_mda`   |
| MTW      | Mean temperature of water                 | `nmea0183.mtw`      | `parse_mtw`   |
| MWV      | Wind speed and angle                      | `nmea0183.mwv`      | `parse_mwv`   |
| PGRMZ    | Garmin altitude                           | `nmea0183.rmz`      | `parse_pgrmz` |
| RMC      | Recommended minimum navigation info       | `nmea0183.rmc`      | `parse_rmc`   |
| TTM      | Tracked target message                    | `nmea0183.ttm`      | `parse_ttm`   |
| TXT      | Text message                              | `nmea0183.txt`      | `parse_txt`   |
| VHW      | Water speed and heading                   | `nmea0183.vhw`      | `parse_vhw`   |
| VTG      | Track made good and ground speed          | `nmea0183.vtg`      | `parse_vtg`   |
| WNC      | Distance, waypoint to waypoint            | `nmea0183.wnc`      | `parse_wnc`   |
| ZDA      | Time and date with local zone             | `nmea0183.zda`      | `parse_zda`   |
| ZFO      | UTC and time from origin waypoint         | `nmea0183.zfo`      | `parse_zfo`   |
| ZTG      | UTC and time to destination waypoint      | `nmea0183.ztg`      | `parse_ztg`   |

Every parser takes an `NmeaSentence` from `nmea0183.sentence`, which holds
the talker id, the `SentenceType`, the comma-separated data field (without
the leading `$`, the header and the `*hh` checksum) and the checksum value.
`nmea0183.wnc` also offers `do_parse_wnc`, which takes the data field as a
plain string.

The field-level building blocks (`Cursor`, `parse_hms`, `parse_date`,
`parse_lat_lon`, `parse_magnetic_variation`, `parse_duration_hms`, ...) live
in `nmea0183.fields`.

## Example

```python
from nmea0183.sentence import NmeaSentence, SentenceType
from nmea0183.gsa import GsaMode1, GsaMode2, parse_gsa

sentence = NmeaSentence(
    talker_id="GP",
    message_id=SentenceType.GSA,
    data="A,3,,,,,,16,18,,22,24,,,3.6,2.1,2.2",
    checksum=0x3C,
)
gsa = parse_gsa(sentence)

assert gsa.mode1 is GsaMode1.AUTOMATIC
assert gsa.mode2 is GsaMode2.FIX_3D
print(gsa.fix_sats_prn)   # [16, 18, 22, 24]
print(gsa.pdop, gsa.hdop, gsa.vdop)   # 3.6 2.1 2.2
```

Empty fields come back as `None`; times come back as `datetime.time`,
dates as `datetime.date` and elapsed times (ZFO, ZTG) as
`datetime.timedelta`. Positions are signed decimal degrees: south and west
are negative. `ZdaData` can combine its fields with `utc_date()`,
`utc_date_time()`, `offset()` and `local_date_time()`.

For GSV the talker id selects the `GnssType` (`GP` GPS, `GL` GLONASS,
`GA` Galileo, `BD`/`GB` BeiDou, `GI` NavIC, `GQ`/`PQ`/`QZ` QZSS), and
`sats_info` always holds four entries, `None` where a slot is unused.

## Errors

Every failure raises a subclass of `NmeaError` from `nmea0183.sentence`:

- `WrongSentenceHeaderError` when a parser is handed a sentence of another
  type (`expected` and `found` hold the two `SentenceType`s),
- `ParsingError` when the data fields are malformed (`message`,
  `remaining` and `kind` describe where and why),
- `UnknownGnssTypeError` when a GSV talker id names no known constellation,
- `UnknownTalkerIdError` when PGRMZ does not come from the `PG` talker,
- `ParameterLengthError` when a text field (TXT text, WNC, ZFO and ZTG
  waypoint ids) is longer than 64 UTF-8 bytes.

```python
from nmea0183.sentence import NmeaError

try:
    data = parse_gsa(sentence)
except NmeaError as exc:
    print(f"could not parse: {exc}")
```

## What the package does not do

- It does not split a raw line such as `$GPGSA,A,3,...*3C` into an
  `NmeaSentence`, nor compute or verify its checksum; the caller builds the
  `NmeaSentence` from the line.
- It keeps no state across sentences: there is no object that merges
  successive sentences into a current fix or a list of satellites in view.
- `SentenceType` names more sentence types (for example GGA, GLL, GNS, AAM,
  DBS, DPT) than there are parsers; only the sentences in the table above
  can be parsed.
- There is no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```