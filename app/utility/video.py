"""
Video probing utilities using FFmpeg
"""
import logging
import os
import shutil
import subprocess

logger = logging.getLogger(__name__)


def check_ffprobe_installed() -> bool:
    return shutil.which("ffprobe") is not None


def get_video_duration(video_path: str) -> float:
    """
    Get the duration of a video file in seconds

    Args:
        video_path: Path to the video file

    Returns:
        float: Duration in seconds, or 0 if it cannot be determined
    """
    if not check_ffprobe_installed():
        return 0

    if not os.path.exists(video_path):
        return 0

    try:
        command = [
            "ffprobe",
            "-v", "error",
            "-show_entries", "format=duration",
            "-of", "default=noprint_wrappers=1:nokey=1",
            video_path
        ]

        result = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=True
        )

        return float(result.stdout.decode().strip())

    except (subprocess.CalledProcessError, ValueError) as e:
        logger.warning(f"Error getting video duration: {str(e)}")
        return 0
