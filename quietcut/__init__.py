"""quietcut: strip long silences from audio and export 16-bit WAV."""

__version__ = "1.0.0"
