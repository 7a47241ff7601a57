"""Core — models, configuration and the generation pipeline."""
