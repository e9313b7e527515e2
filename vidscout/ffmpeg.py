"""Merging downloaded parts with ffmpeg."""

from __future__ import annotations

import contextlib
import os
import subprocess


def _remove(path: str) -> None:
    with contextlib.suppress(OSError):
        os.remove(path)


def _run_merge(command: list[str], paths: list[str], merge_file_path: str = "") -> None:
    try:
        result = subprocess.run(
            command, stdout=subprocess.DEVNULL, stderr=subprocess.PIPE
        )
    except OSError as exc:
        raise RuntimeError(f"cannot run {command[0]}: {exc}") from exc
    if result.returncode != 0:
        stderr = (result.stderr or b"").decode("utf-8", errors="replace")
        raise RuntimeError(f"exit status {result.returncode}\n{stderr}")
    if merge_file_path:
        _remove(merge_file_path)
    for path in paths:
        _remove(path)


def merge_audio_and_video(paths: list[str], merged_file_path: str) -> None:
    """Mux separate audio and video files into one, removing the inputs."""
    command = ["ffmpeg", "-y"]
    for path in paths:
        command += ["-i", path]
    command += ["-c:v", "copy", "-c:a", "copy", merged_file_path]
    _run_merge(command, paths)


def merge_to_mp4(paths: list[str], merged_file_path: str, filename: str) -> None:
    """Concatenate video parts into one MP4, removing the parts and list file."""
    merge_file_path = filename + ".txt"
    with open(merge_file_path, "w", encoding="utf-8") as merge_file:
        for path in paths:
            merge_file.write(f"file '{path}'\n")
    command = [
        "ffmpeg", "-y", "-f", "concat", "-safe", "-1",
        "-i", merge_file_path, "-c", "copy", "-bsf:a", "aac_adtstoasc", merged_file_path,
    ]
    _run_merge(command, paths, merge_file_path)