import os

# prefer ipdb over pdb in tests
os.environ.setdefault("PYTHONBREAKPOINT", "ipdb.set_trace")
