"""Conversion activities.

Each activity performs a single unit of work within the conversion:
- parse_facility: Decode the vSTARS XML into video map records
- extract_segments: Turn Line elements into float32 endpoints
- write_video_maps: Encode the endpoints as vice DMS JSON
"""
