"""Resource references found in manifest files."""

from pathlib import Path

import yaml
from icecream import ic


def find_kind_name_in_document(document: Path) -> str | None:
    """Find the first ``kind/name`` reference described by a manifest.

    The kind is lowercased, so a Pod manifest yields ``pod/<name>``.

    Args:
        document: Path to a YAML manifest.

    Returns:
        The reference, or None if the file is unreadable or describes no
        named resource.

    """
    try:
        with document.open() as stream:
            docs = [doc for doc in yaml.safe_load_all(stream) if doc is not None]
    except (OSError, yaml.YAMLError) as e:
        ic(e)
        return None

    for doc in docs:
        if not isinstance(doc, dict):
            continue
        kind = doc.get("kind")
        metadata = doc.get("metadata")
        name = metadata.get("name") if isinstance(metadata, dict) else None
        if kind and name:
            return f"{str(kind).lower()}/{name}"

    return None
