"""Soil description parsing package.

Turns free-form geotechnical field descriptions (e.g. "compact silty sand, some clay, wet") into structured
records with primary and secondary constituents, consistency, moisture and a precedence-ordered term list.

Instructions:
- usage: from soil_description.description import classify, extract_ordered_terms

List of modules:
- text
    - normalizer
- vocabulary
    - vocabulary
- extraction
    - field_extractor
    - token_classifier
    - precedence_sorter
- utils
    - description_classes
    - data_utils
    - util
- description
- main
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

if os.getenv("SOIL_DESCRIPTION_DATA_PATH") is not None:
    DATAPATH = Path(os.getenv("SOIL_DESCRIPTION_DATA_PATH"))
else:
    DATAPATH = Path(__file__).parent.parent.parent / "data"

PROJECT_ROOT = Path(os.path.abspath(__file__)).parent.parent.parent
