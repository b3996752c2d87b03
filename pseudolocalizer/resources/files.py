"""
Resource file processing.

This module handles writing pseudo-localized resource files:
- Walker selection by file extension
- Output naming with the output culture
- Atomic file writing
- Batch processing that keeps going past broken files
"""

import io
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from pseudolocalizer.cultures import DEFAULT_OUTPUT_CULTURE, build_output_path
from pseudolocalizer.exceptions import FileProcessingError, ResourceError, UnsupportedResourceError
from pseudolocalizer.logger import get_logger
from pseudolocalizer.resources.json_locale import JsonProcessor
from pseudolocalizer.resources.resx import ResxProcessor
from pseudolocalizer.transforms.pipeline import DEFAULT_TRANSFORMS, Pipeline

logger = get_logger(__name__)

PROCESSORS = {
    ".resx": ResxProcessor,
    ".json": JsonProcessor,
}


@dataclass
class ProcessResult:
    """Outcome of pseudo-localizing one file."""
    input_path: Path
    output_path: Path
    entry_count: int


@dataclass
class BatchResult:
    """Outcome of pseudo-localizing several files."""
    succeeded: List[ProcessResult] = field(default_factory=list)
    failed: List[Tuple[Path, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def get_processor(path: Path, transform: Callable[[str], str]):
    """
    Pick the resource walker for a file.

    Raises:
        UnsupportedResourceError: If the extension has no walker
    """
    suffix = Path(path).suffix.lower()
    processor_cls = PROCESSORS.get(suffix)
    if processor_cls is None:
        supported = ", ".join(sorted(PROCESSORS))
        raise UnsupportedResourceError(
            f"Unsupported resource file type '{suffix or path}' (supported: {supported})",
            details={"path": str(path)},
        )
    return processor_cls(transform)


def _atomic_write_bytes(file_path: Path, data: bytes):
    """
    Write bytes to file atomically.

    Writes to a temporary file in the target directory, then renames it over
    the target, so a failed write never leaves a partial output file.

    Raises:
        FileProcessingError: If write fails
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)

    temp_fd, temp_path = tempfile.mkstemp(
        dir=file_path.parent,
        prefix=f".{file_path.stem}_",
        suffix=f"{file_path.suffix}.tmp"
    )
    temp_path = Path(temp_path)

    try:
        with os.fdopen(temp_fd, 'wb') as f:
            f.write(data)
        temp_path.replace(file_path)
        logger.debug(f"Atomic write successful: {file_path}")
    except OSError as e:
        if temp_path.exists():
            temp_path.unlink()
        raise FileProcessingError(f"Atomic write failed for {file_path}: {e}") from e


def process_file(
    input_path: Path,
    transform_names: Sequence[str] = DEFAULT_TRANSFORMS,
    output_culture: str = DEFAULT_OUTPUT_CULTURE,
    output_path: Optional[Path] = None,
) -> ProcessResult:
    """
    Pseudo-localize one resource file.

    Args:
        input_path: The .resx or .json file to read
        transform_names: Ordered transform identifiers
        output_culture: Culture code used in the output file name
        output_path: Explicit output path (defaults to the culture-suffixed name)

    Returns:
        ProcessResult with the written path and number of values

    Raises:
        UnknownTransformError: If a transform identifier is not registered
        UnsupportedResourceError: If the file type has no walker
        ResourceFormatError: If the document cannot be parsed
        FileProcessingError: If the output cannot be written or is the input itself
        OSError: If the input cannot be read
    """
    input_path = Path(input_path)
    pipeline = Pipeline.from_names(transform_names)
    processor = get_processor(input_path, pipeline)
    output_path = Path(output_path) if output_path else build_output_path(input_path, output_culture)
    if output_path.resolve() == input_path.resolve():
        raise FileProcessingError(
            f"Output {output_path} would overwrite its own input; rename the source or pick another culture"
        )

    logger.info(f"Pseudo-localizing {input_path} with [{', '.join(pipeline.names)}]")

    buffer = io.BytesIO()
    with open(input_path, 'rb') as input_stream:
        count = processor.process(input_stream, buffer)

    _atomic_write_bytes(output_path, buffer.getvalue())

    logger.info(f"The file {output_path} was written successfully ({count} values)")
    return ProcessResult(input_path=input_path, output_path=output_path, entry_count=count)


def process_files(
    paths: Iterable[Path],
    transform_names: Sequence[str] = DEFAULT_TRANSFORMS,
    output_culture: str = DEFAULT_OUTPUT_CULTURE,
) -> BatchResult:
    """
    Pseudo-localize several files independently.

    File system and resource errors are logged and recorded as failures; the
    remaining files are still processed. Anything else propagates.
    """
    # Resolve once so a bad identifier fails before any file is touched
    Pipeline.from_names(transform_names)

    batch = BatchResult()
    for path in paths:
        path = Path(path)
        try:
            batch.succeeded.append(process_file(path, transform_names, output_culture))
        except (OSError, ResourceError, FileProcessingError) as e:
            logger.error(f"Failed to process {path}: {e}")
            batch.failed.append((path, str(e)))

    return batch
