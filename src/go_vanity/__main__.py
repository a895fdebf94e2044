from go_vanity.cli import cli

cli()
