"""
Locate and load a .env file for the HTTP service.
"""
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def load_timing_dotenv(start_dir: Optional[Path] = None) -> tuple[bool, list[Path]]:
    """
    Load the first .env found in start_dir, its parent, or the working directory.

    Values already present in the environment win over the file.

    Returns:
        (loaded, searched_paths)
    """
    base = Path(start_dir) if start_dir is not None else Path(__file__).parent
    candidates = [base / ".env", base.parent / ".env", Path.cwd() / ".env"]

    searched: list[Path] = []
    for path in candidates:
        if path in searched:
            continue
        searched.append(path)
        if path.is_file():
            load_dotenv(path, override=False)
            return True, searched
    return False, searched
