from qapress.cli import app

app(prog_name="qapress")
