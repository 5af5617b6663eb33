"""track-cleanup: single-pass audio and subtitle stream cleanup planning.

Decides which audio and subtitle streams of a probed media file to keep,
which audio streams get an AAC companion track, and synthesizes the
ordered remux/transcode directives that encode the decision.
"""

__version__ = "0.1.0"
