import os

# Abandoned Strings configuration
# Defaults mirror the SwiftGen `L10n` accessor convention used by iOS projects.

NAMESPACE = "L10n"
SOURCE_EXTENSIONS = ["h", "m", "swift"]
STORYBOARD_EXTENSION = "storyboard"
STRINGS_EXTENSION = "strings"

# Bare trailing tokens accepted on the command line
STORYBOARD_FLAG = "storyboard"
WRITE_FLAG = "write"

EXCLUDED_DIRS = {".git"}

ENV_FILE = ".env"
NAMESPACE_ENV = "ABANDONED_STRINGS_NAMESPACE"
WORKERS_ENV = "ABANDONED_STRINGS_WORKERS"

def load_env(env_path=None):
    """Export KEY=VALUE pairs from a local .env file into os.environ."""
    env_path = env_path or os.path.join(os.getcwd(), ENV_FILE)
    if not os.path.exists(env_path):
        return False
    with open(env_path, "r") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, value = line.split("=", 1)
                os.environ[key.strip()] = value.strip()
    return True

def get_namespace():
    return os.environ.get(NAMESPACE_ENV, "").strip() or NAMESPACE

def get_max_workers():
    # None lets the thread pool pick its own size
    raw = os.environ.get(WORKERS_ENV, "").strip()
    if not raw:
        return None
    try:
        workers = int(raw)
    except ValueError:
        return None
    return workers if workers > 0 else None
