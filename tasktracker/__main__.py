from tasktracker.main import run

run()
