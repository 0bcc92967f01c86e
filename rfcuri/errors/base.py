class RfcUriError(Exception):
    ...
