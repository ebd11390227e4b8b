class Constants:
    # Environment variable holding the search path (os.pathsep separated)
    ENV_VAR = "CONFIG_PATH"
    # Fallback when ENV_VAR is unset; applications may assign before first load
    DEFAULT_PATH = ""
    LOG_PREFIX = "config"
    DEFAULT_ENCODING = "utf-8"
