from blogapi.cli import app

app(prog_name="blogapi")
