# STACKUP v1.0


class ConfigurationError(ValueError):
    '''Probe target or endpoint is invalid. Never retried.'''

    def __init__(self, message, target_name=None):
        self.target_name = target_name
        if target_name:
            message = f"{target_name}: {message}"
        self.message = message
        super().__init__(self.message)


class ProbeFailure(Exception):
    '''A single probe attempt did not succeed'''

    def __init__(self, endpoint: str, reason: str):
        self.endpoint = endpoint
        self.reason = reason
        self.message = f"{endpoint}: {reason}"
        super().__init__(self.message)
