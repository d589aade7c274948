from station_extract.cli import app

app(prog_name="station-extract")
