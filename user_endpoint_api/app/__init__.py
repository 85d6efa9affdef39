"""
Application package.

The service is split into layers: ``schemas`` (wire and record
models), ``repositories`` (storage), ``services`` (validation and
ordering) and ``api`` (named remote operations grouped per endpoint
and API version).  ``core`` holds configuration, logging, database
and error helpers shared by all layers.
"""
