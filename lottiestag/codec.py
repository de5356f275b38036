"""
Decoding and encoding of complete documents.

decode() turns the JSON text (or already parsed data) into a Document and
either succeeds completely or raises a single DecodeError. encode() writes a
Document back to JSON text using the format's keys.

Top-level layers do not depend on each other, so with more than one worker
they are decoded on a thread pool. Results are collected in input order and
the first failing layer in input order is the one reported.
"""

import json
import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Union

from pydantic import ValidationError

from .config import settings
from .document import Document
from .errors import DecodeError, DecodeErrorKind
from .layers import Layer

logger = logging.getLogger(__name__)

Source = Union[str, bytes, bytearray, memoryview, dict]


def parse(source: Source) -> Any:
    """
    Parse JSON text into Python data; parsed data is returned as is.

    :raises DecodeError: With kind PARSE if the text is not valid JSON
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        try:
            source = bytes(source).decode('utf-8')
        except UnicodeDecodeError as error:
            raise DecodeError(DecodeErrorKind.PARSE, f"input is not UTF-8: {error}") from error
    if isinstance(source, str):
        try:
            return json.loads(source)
        except json.JSONDecodeError as error:
            raise DecodeError(
                DecodeErrorKind.PARSE,
                f"{error.msg} (line {error.lineno}, column {error.colno})",
            ) from error
    return source


def decode_layer(data: Any, index: int = 0) -> Layer:
    """
    Decode a single layer record.

    :param data: Parsed layer record
    :param index: Position in the layer list, used for error locations
    """
    try:
        return Layer.model_validate(data)
    except ValidationError as error:
        raise DecodeError.from_validation_error(error, ('layers', index)) from error


def _leading_keys() -> set[str]:
    """Names and aliases of the document fields validated before "layers"."""
    keys = set()
    for name, field in Document.model_fields.items():
        if name == 'layers':
            break
        keys.update(key for key in (name, field.alias) if key)
    return keys


def _check_leading_fields(data: dict) -> None:
    """
    Report a violation in the document fields that precede "layers".

    A sequential decode meets these before any layer, so the parallel path
    checks them first to report the same error.
    """
    try:
        Document.model_validate({**data, 'layers': []})
    except ValidationError as error:
        details = error.errors()
        if details and details[0]['loc'] and details[0]['loc'][0] in _leading_keys():
            raise DecodeError.from_validation_error(error) from error


def _decode_layers_parallel(layers: list[Any], workers: int) -> list[Layer]:
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures: list[Future] = [
            executor.submit(decode_layer, data, index)
            for index, data in enumerate(layers)
        ]
        return [future.result() for future in futures]


def decode(source: Source, *, workers: int | None = None) -> Document:
    """
    Decode a complete document.

    :param source: JSON text (str or UTF-8 bytes) or already parsed data
    :param workers: Threads for decoding top-level layers, defaults to
        settings.DECODE_WORKERS
    :return: The decoded document
    :raises DecodeError: On the first violation found
    """
    start = time.perf_counter()
    data = parse(source)

    workers = settings.DECODE_WORKERS if workers is None else workers
    raw_layers = data.get('layers') if isinstance(data, dict) else None
    parallel = (
        workers > 1
        and isinstance(raw_layers, list)
        and len(raw_layers) >= settings.PARALLEL_MIN_LAYERS
    )
    if parallel:
        _check_leading_fields(data)
        data = {**data, 'layers': _decode_layers_parallel(raw_layers, workers)}

    try:
        document = Document.model_validate(data)
    except ValidationError as error:
        raise DecodeError.from_validation_error(error) from error

    elapsed_ms = (time.perf_counter() - start) * 1000
    mode = f"{workers} workers" if parallel else "sequential"
    logger.debug(
        f"Decoded document {document.name!r}: {len(document.layers)} layers, "
        f"{len(document.assets)} assets in {elapsed_ms:.1f} ms ({mode})"
    )
    return document


def encode(document: Document, indent: int | None = None) -> str:
    """Encode a document to JSON text."""
    return json.dumps(document.to_dict(), indent=indent)
