"""Process exit statuses of the track-cleanup commands.

The tens digit names the stage that failed: 1x settings, 2x input file,
3x external tools, 4x planning.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0

    # Config file, environment or --set values rejected
    POLICY_VALIDATION_ERROR = 10
    CONFIG_ERROR = 11

    TARGET_NOT_FOUND = 20

    FFPROBE_NOT_FOUND = 30

    # Probe failed, or no original language could be found
    ANALYSIS_ERROR = 40
    LANGUAGE_UNRESOLVED = 41
