from pseudolocalizer.cli import app

app(prog_name="pseudolocalize")
