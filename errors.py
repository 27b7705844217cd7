# errors raised by the bootstrap stages
# helpers raise, only main catches

class BootstrapError(Exception):
    pass

class ConfigError(BootstrapError):
    pass

class CommandError(BootstrapError):
    def __init__(self, label, status = None):
        self.label = label
        self.status = status

        if status is None:
            super().__init__("failed to run: " + label)
        else:
            super().__init__("command failed: " + label)
