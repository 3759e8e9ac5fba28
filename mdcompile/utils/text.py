from typing import List


def read_document_lines(path: str, encoding: str = "utf-8-sig") -> List[str]:
    """
    Read a markdown document as a list of lines without line terminators.
    A trailing newline does not produce an extra empty line; a UTF-8 BOM is
    dropped and undecodable bytes become U+FFFD instead of aborting the run.
    """
    with open(path, encoding=encoding, errors="replace") as f:
        return f.read().splitlines()
