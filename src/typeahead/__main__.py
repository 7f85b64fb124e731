from typeahead.main import run

run()
