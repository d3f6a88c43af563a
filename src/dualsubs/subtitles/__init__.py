from __future__ import annotations

from .types import Cue, merge_cues, merge_tracks
from .srt_reader import iter_cues, read_cues
from .srt_writer import SrtWriter, cue_to_srt, cues_to_srt, write_srt

__all__ = [
    "Cue",
    "merge_cues",
    "merge_tracks",
    "iter_cues",
    "read_cues",
    "SrtWriter",
    "cue_to_srt",
    "cues_to_srt",
    "write_srt",
]
