import os
import sys

# Put src/ on the import path so the tests run from a plain checkout.
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))
