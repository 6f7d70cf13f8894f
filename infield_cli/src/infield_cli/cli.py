#!/usr/bin/env python3
"""
CLI interface for infield.
Handles target resolution, configuration overrides and output rendering.

    infield myapp.models:Order myapp.models:Customer --output.format json_schema
"""

import argparse
import importlib
import json
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger
from pydantic import ValidationError

from infield_lib.discovery import check_backend_agreement
from infield_lib.errors import InputFieldDiscoveryError

from infield_cli.config import InfieldConfig
from infield_cli.render import to_fields_yaml, to_json_schema


def configure_logging(level: str = "INFO") -> None:
    """Configure loguru: TIME | LEVEL | MESSAGE on stderr."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <7}</level> | {message}",
        level=level.upper(),
        colorize=False,
    )


def auto_cast_value(value):
    """Auto-cast string values to appropriate types (bool, int, float, or string)."""
    if isinstance(value, bool):
        return value

    if not isinstance(value, str):
        return value

    if value.lower() in ("true", "yes"):
        return True
    if value.lower() in ("false", "no"):
        return False

    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    return value


def _is_option_or_target(arg: str) -> bool:
    return arg.startswith("--") or ":" in arg


def parse_cli_args(args_list):
    """
    Split CLI arguments into positional targets and dot-notation overrides.

    Examples:
        myapp.models:Order --discovery.backend namespace
            → (['myapp.models:Order'], {'discovery': {'backend': 'namespace'}})

        myapp.models:Order --output.format=json_schema --discovery.cache false
            → (['myapp.models:Order'], {'output': {'format': 'json_schema'}, 'discovery': {'cache': False}})

        --discovery.compare_backends myapp.models:Order
            → (['myapp.models:Order'], {'discovery': {'compare_backends': True}})

    Args:
        args_list: List of command-line arguments (sys.argv[1:])

    Returns:
        tuple: (targets, nested dictionary of overrides)
    """
    targets = []
    overrides = {}

    i = 0
    while i < len(args_list):
        arg = args_list[i]

        if not arg.startswith("--"):
            targets.append(arg)
            i += 1
            continue

        key_path = arg[2:]

        # --key=value
        if "=" in key_path:
            key_path, value = key_path.split("=", 1)
            i += 1
        # --key value (a "module:Class" target is never a value)
        elif i + 1 < len(args_list) and not _is_option_or_target(args_list[i + 1]):
            value = args_list[i + 1]
            i += 2
        else:
            # Boolean flag (no value provided, treat as True)
            value = True
            i += 1

        keys = key_path.split(".")
        current = overrides
        for key in keys[:-1]:
            if key not in current:
                current[key] = {}
            elif not isinstance(current[key], dict):
                raise ValueError(f"Conflicting CLI overrides: '{key_path}' conflicts with a parent key")
            current = current[key]
        current[keys[-1]] = auto_cast_value(value)

    return targets, overrides


def load_target(spec: str):
    """Resolve ``package.module:Qualified.Name`` to the object it names."""
    module_name, sep, qualname = spec.partition(":")
    if not sep or not module_name or not qualname:
        raise ValueError(f"Target '{spec}' must look like 'package.module:ClassName'")
    obj = importlib.import_module(module_name)
    for part in qualname.split("."):
        obj = getattr(obj, part)
    return obj


def setup_argparser():
    """Create the argument parser (used for --help only; everything else is parsed dynamically)."""
    parser = argparse.ArgumentParser(
        prog="infield",
        description="Discover the input fields of Python classes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List input fields as YAML
  infield myapp.models:Order

  # Use the namespace scanner and print a JSON schema
  infield myapp.models:Order --discovery.backend namespace --output.format json_schema

  # Only admit members declared under myapp, require both scanners to agree
  infield myapp.models:Order --discovery.include_modules myapp --discovery.compare_backends true

Any config parameter from config.yaml can be overridden using dot notation: --section.key value
Set INFIELD_CONFIG to load a different config file.
        """,
    )
    return parser


def render(config: InfieldConfig, title: str, fields) -> str:
    if config.output.format == "json_schema":
        return json.dumps(to_json_schema(title, fields), indent=2, default=str)
    return to_fields_yaml(fields, title=title, strip_nulls=config.output.strip_nulls)


def run(config: InfieldConfig, targets: list[str]) -> int:
    """Discover and print input fields for every target. Returns exit code."""
    discovery = config.discovery.build()
    scanners = config.discovery.scanners() if config.discovery.compare_backends else None

    exit_code = 0
    for spec in targets:
        try:
            target = load_target(spec)
            if scanners:
                fields = check_backend_agreement(
                    target, scanners, discovery.inclusion_policy, discovery.type_transformer
                )
                logger.info(f"{spec}: {', '.join(s.name for s in scanners)} scanners agree")
            else:
                fields = discovery.discover(target)
        except (ImportError, AttributeError, ValueError) as e:
            logger.error(f"Cannot load target '{spec}': {e}")
            exit_code = 1
            continue
        except InputFieldDiscoveryError as e:
            logger.error(f"Discovery failed for '{spec}': {e}")
            exit_code = 1
            continue

        logger.info(f"{spec}: {len(fields)} input field(s)")
        print(render(config, spec.partition(":")[2], fields))
    return exit_code


def main(argv=None) -> int:
    """Main CLI entry point with configuration loading and discovery."""
    argv = sys.argv[1:] if argv is None else list(argv)

    # Load .env from the working directory (does NOT override existing env vars)
    load_dotenv(Path.cwd() / ".env")

    parser = setup_argparser()
    parser.parse_known_args(argv)

    configure_logging()
    try:
        targets, cli_overrides = parse_cli_args(argv)
        config = InfieldConfig.load(overrides=cli_overrides)
    except FileNotFoundError as e:
        logger.error(f"Config file not found: {e.filename}")
        return 1
    except (ValueError, ValidationError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    configure_logging(config.logging.level)
    logger.debug(f"Effective config: {config.to_dict()}")
    if cli_overrides:
        logger.debug(f"CLI overrides applied: {cli_overrides}")

    if not targets:
        parser.print_usage(sys.stderr)
        logger.error("No targets given")
        return 2

    return run(config, targets)


def cli_main():
    """Synchronous entry point for console script."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
