from stockwatch.cli import app

app(prog_name="stockwatch")
