from printsize.main import run

run()
