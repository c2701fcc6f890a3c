from polysecret.cli import entry

entry()
