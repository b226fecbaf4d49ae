from .env import env_int, load_project_dotenv  # noqa: F401
from .random_source import RandomSource  # noqa: F401

# Automatically load project-level .env once utils is imported.
load_project_dotenv()
