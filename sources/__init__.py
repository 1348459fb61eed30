# Importing the source modules registers them
from . import json_dir, morph_datasets  # noqa: F401
