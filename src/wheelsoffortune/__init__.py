"""
Wheels of Fortune: generative wheels that blow away into particles and
reassemble on demand.
"""
