"""Conversion orchestration.

- video_map_pipeline: parse → extract → write for one facility file
"""
