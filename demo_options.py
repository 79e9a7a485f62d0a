"""
Demo: Build the example web server options, validate them and print them.
"""

from iniopt.examples import build_example_options, build_example_schema
from iniopt.schema import SchemaMode, validate_options
from iniopt.serialization import options_to_yaml
from iniopt.settings import configure_logging, load_settings
from iniopt.values import OptionType


def print_report(report):
    """Pretty-print a ValidationReport."""
    print()
    print("=" * 70)
    print(f"VALIDATION REPORT ({report.mode.value})")
    print("=" * 70)
    print(f"  Valid:             {report.valid}")
    print(f"  Invalid options:   {', '.join(report.invalid_options) or '(none)'}")
    print(f"  Unknown options:   {', '.join(report.unknown_options) or '(none)'}")
    print(f"  Missing mandatory: {', '.join(report.missing_mandatory) or '(none)'}")
    if report.warnings:
        print()
        print("  Warnings:")
        for msg in report.warnings:
            print(f"    - {msg}")
    print()


def main():
    settings = load_settings()
    configure_logging(settings)

    schema = build_example_schema()
    options = build_example_options()

    print("OPTIONS")
    for option in options:
        print(f"  {option.render(settings.list_delimiter)}")

    print_report(validate_options(options, schema, settings.default_mode))
    print_report(validate_options(options, schema, SchemaMode.STRICT))

    ports = options[1]
    ports.add_to_list(8443, position=0)
    print(f"Ports after insert: {ports.get_list(OptionType.UNSIGNED)}")

    print()
    print("YAML")
    print(options_to_yaml(options))


if __name__ == "__main__":
    main()
