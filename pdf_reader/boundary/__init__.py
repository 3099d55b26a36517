"""
Boundary layer for external system integrations.

Handles all interactions outside the controller: the remote processing and
question-answering service, the local document handle, and the viewport.
"""
