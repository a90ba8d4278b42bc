"""Application-level constants."""

from pathlib import Path

# Keys for serialization
ROW_KEY = "row"
INPUT_KEY = "input"
SEGMENTS_KEY = "segments"
PATH_KEY = "path"
RECORD_KEY = "record"
CONTEXT_KEY = "context"

# Column names for resolved output
CLC_PATHS_COL = "clc_paths"
CLC_PATH_COL = "clc_path"
CLC_CODE_COL = "clc_code"
CLC_NAME_COL = "clc_name"
CLC_NAME_PATH_COL = "clc_name_path"

# Output filenames
RESULTS_FILENAME = "clc_results.json"
LOG_FILENAME = "run.log"

# Output directory structure
OUTPUT_ROOT = Path("outputs")
