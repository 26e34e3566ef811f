"""
Constants for hREA Docs
"""

from __future__ import annotations


VERSION = "1.0.0"
TOOL_NAME = "hREA Docs"


class Colors:
    """ANSI colors for terminal output"""
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"
    BOLD = "\033[1m"
    END = "\033[0m"

    def colorize(self, text: str, color: str) -> str:
        return f"{color}{text}{self.END}"

    def success(self, text: str) -> str:
        return self.colorize(f"✓ {text}", self.GREEN)

    def error(self, text: str) -> str:
        return self.colorize(f"✗ {text}", self.RED)

    def warning(self, text: str) -> str:
        return self.colorize(f"! {text}", self.YELLOW)

    def info(self, text: str) -> str:
        return self.colorize(text, self.CYAN)

    def dim(self, text: str) -> str:
        return self.colorize(text, self.GRAY)


COLORS = Colors()


# ======================================
# Module table
# ======================================

# Which classes are enabled via which module. Names use the casing of the
# resolver files in vf-graphql-holochain's queries/ and mutations/ folders.
CLASSES_PER_MODULE: dict[str, list[str]] = {
    "action": ["action"],
    "process_specification": ["processSpecification"],
    "resource_specification": ["resourceSpecification"],
    "measurement": ["unit"],
    "agent": ["agent"],
    "agreement": ["agreement"],
    "observation": ["economicEvent", "economicResource"],
    "process": ["process"],
    # 'proposedTo' also requires 'agent'
    "proposal": ["proposal", "proposedIntent", "proposedTo"],
    "plan": ["plan"],
    "fulfillment": ["fulfillment"],
    "intent": ["intent"],
    "commitment": ["commitment"],
    "satisfaction": ["satisfaction"],
    "util": [],
    "pagination": [],
}

# Utility modules that get no reference page
EXCLUDED_MODULES: tuple[str, ...] = ("util", "pagination")


# ======================================
# Default paths
# ======================================

CONFIG_FILE_NAME = "hrea-docs.yaml"

DEFAULT_RESOLVERS_PATH = "../hrea/modules/vf-graphql-holochain"
DEFAULT_QUERIES_DIR = "queries"
DEFAULT_MUTATIONS_DIR = "mutations"
DEFAULT_OUTPUT_PATH = "../graphql-developer-docs/reference/graphql-api-reference"
DEFAULT_SCHEMA_PATHS: tuple[str, ...] = ("../hrea/modules/vf-graphql/lib/schemas",)

INDEX_FILE_NAME = "index.ts"
SOURCE_SUFFIX = ".ts"

SCHEMA_SUFFIXES: tuple[str, ...] = (".graphql", ".gql")
