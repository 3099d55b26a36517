"""
PDF Reader client.

Client-side controller for asking questions about an uploaded PDF through
a remote processing and question-answering service.
"""

__version__ = "0.1.0"
