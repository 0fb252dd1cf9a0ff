"""
This package contains all modules related to parsing and decoding data
received from the Cloudwatcher.

Sub-packages handle specific data formats:

- ``payload``: The ``key=value`` text payload served by the device over HTTP.
"""
