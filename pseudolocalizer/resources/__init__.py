"""
Resources module - Resource document walkers

This module provides:
- resx: ResX (XML) walker
- json_locale: JSON locale file walker
- files: file-level processing with culture-suffixed output names
"""

from pseudolocalizer.resources.resx import ResxProcessor, iter_entries, is_localizable
from pseudolocalizer.resources.json_locale import JsonProcessor, transform_json, flatten_json
from pseudolocalizer.resources.files import (
    PROCESSORS,
    ProcessResult,
    BatchResult,
    get_processor,
    process_file,
    process_files,
)
