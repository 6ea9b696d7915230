from unifi_cli.cli.main import run

run()
