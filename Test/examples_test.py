import os
import runpy
from glob import glob
import pytest


examplesFolder = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "Examples")
examplePaths = sorted(glob(os.path.join(examplesFolder, "*.py")))


@pytest.mark.parametrize("examplePath", examplePaths, ids=os.path.basename)
def test_example(examplePath):
    # The examples check their own results with assert statements.
    runpy.run_path(examplePath, run_name="__main__")
