"""
JSON codec for protocol messages.

``fields`` holds the per-field wire rules shared by every payload and message;
``json_codec`` turns whole messages into wire text and back.
"""
