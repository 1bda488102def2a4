"""
Logical dataset names and code geometry for the IFSC directory.

Goal:
- The core never knows where datasets live, only their logical names.
- A loader turns a logical name into raw bytes (file, package data, anything).
"""

# Primary code dataset: 4-char bank prefix -> list of branch suffixes
DATASET_IFSC = "IFSC.json"

# Bank code -> display name
DATASET_BANK_NAMES = "banknames.json"

# Bank code -> bank details (type, representative IFSC, MICR, IIN, NACH flags)
DATASET_BANKS = "banks.json"

# Alias code -> bank code (direct overrides)
DATASET_SUBLET = "sublet.json"

# Code prefix -> bank code (prefix overrides)
DATASET_CUSTOM_SUBLETS = "custom-sublets.json"

ALL_DATASETS = (
    DATASET_IFSC,
    DATASET_BANK_NAMES,
    DATASET_BANKS,
    DATASET_SUBLET,
    DATASET_CUSTOM_SUBLETS,
)

# IFSC layout: AAAA0BBBBBB
IFSC_LENGTH = 11
BANK_CODE_LENGTH = 4
SEPARATOR_INDEX = 4
SEPARATOR_CHAR = "0"
