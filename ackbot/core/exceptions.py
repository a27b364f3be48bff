class ConfigException(Exception):
    pass


class ExtensionNotInConfig(ConfigException):
    def __init__(self, extension_name: str):
        self.extension_name: str = extension_name
        super().__init__(f"Extension {self.extension_name} is not in the config.")


class ExtensionIsRequired(ConfigException):
    def __init__(self, extension_name: str):
        self.extension_name: str = extension_name
        super().__init__(f"Extension {self.extension_name} is a required extension.")
