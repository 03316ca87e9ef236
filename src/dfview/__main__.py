from dfview.app import run

run()
