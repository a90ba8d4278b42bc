from pathlib import Path

# Repo-root conventional directories/files (overrideable via parser.yaml or environment)
CONFIG_DIR = Path("configs")
PARSER_CONFIG_FILE = CONFIG_DIR / "parser.yaml"
TAXONOMY_FILE = CONFIG_DIR / "taxonomy.yaml"

# Environment overrides
ENV_TAXONOMY_FILE = "CLC_TAXONOMY_FILE"
ENV_LOG_LEVEL = "CLC_LOG_LEVEL"

TAXONOMY_SUFFIXES_JSON = {".json"}
TAXONOMY_SUFFIXES_YAML = {".yaml", ".yml"}
