from typing import TypedDict


class VFSStats(TypedDict):
    file_count: int
    dir_count: int


class VFSStatResult(TypedDict):
    name: str
    full_path: str
    is_dir: bool
    line_count: int
