from bootup import run_as_a_module

if __name__ == '__main__':
	run_as_a_module()
