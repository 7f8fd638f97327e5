"""
The CONTROLLER layer mutates the ArtworkState in response to user input
(dispersal, restoration, resize) and advances it once per frame.
"""
