import appdirs # type: ignore

config_dir : str = appdirs.user_config_dir("PotGen", "PyPotGen", roaming=True)
