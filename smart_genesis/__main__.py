from smart_genesis.cli.main import app

app()
