import sys
from pathlib import Path

# Modules live at the project root and import each other by bare name
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
