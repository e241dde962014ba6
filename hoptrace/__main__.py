from hoptrace.server import run

run()
