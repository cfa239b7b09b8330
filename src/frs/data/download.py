from __future__ import annotations

from pathlib import Path

import requests
from loguru import logger

SNAP_FACEBOOK_URL = "https://snap.stanford.edu/data/facebook_combined.txt.gz"
SNAP_FACEBOOK_FILE = "facebook_combined.txt.gz"


def download_snap_facebook(data_dir: str | Path) -> Path:
    """
    Download the SNAP ego-Facebook edge list to data_dir/facebook_combined.txt.gz.
    Returns the path to the cached file; an existing download is reused.
    """
    data_dir = Path(data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)
    out_path = data_dir / SNAP_FACEBOOK_FILE

    if out_path.exists() and out_path.stat().st_size > 0:
        logger.debug("using cached edge list at {}", out_path)
        return out_path

    logger.info("downloading {}", SNAP_FACEBOOK_URL)
    r = requests.get(SNAP_FACEBOOK_URL, timeout=120)
    r.raise_for_status()
    out_path.write_bytes(r.content)

    return out_path
