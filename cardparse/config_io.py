import json
import os
import yaml
from cardparse.parse_config import ParseConfig


def _can_use_yaml():
	return hasattr(yaml, "safe_dump") and hasattr(yaml, "safe_load")


def _is_yaml_path(path):
	return os.path.splitext(path)[1].lower() in (".yml", ".yaml")


def save_config(config, path):
	if hasattr(config, "__dict__"):
		data = {k: getattr(config, k) for k in vars(config).keys()}
	else:
		if isinstance(config, dict):
			data = dict(config)
		else:
			data = {}

	dirn = os.path.dirname(path)
	if dirn:
		if not os.path.isdir(dirn):
			os.makedirs(dirn, exist_ok=True)

	if _is_yaml_path(path) and _can_use_yaml():
		with open(path, "w") as f:
			yaml.safe_dump(data, f, sort_keys=True)
	else:
		with open(path, "w") as f:
			json.dump(data, f, indent=2, sort_keys=True)

	return path


def load_config(path):
	if _is_yaml_path(path) and _can_use_yaml():
		with open(path, "r") as f:
			out = yaml.safe_load(f)
		if out:
			return out
		else:
			return {}

	with open(path, "r") as f:
		return json.load(f)


def parse_config_from_file(path, overrides=None):
	data = load_config(path) if path else {}

	if not isinstance(data, dict):
		data = {}

	merged = {k: v for k, v in data.items() if k in ("delimiter", "strict")}
	if overrides:
		merged.update(overrides)

	return ParseConfig.from_env(merged)
