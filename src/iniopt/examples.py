"""
Example option set for a small web server section.

Builds a schema and a matching set of options, including one list option,
one option with a value the schema rejects and one the schema does not know.
"""
from iniopt.option import Option
from iniopt.schema import OptionSchema, Schema
from iniopt.values import OptionType


def build_example_schema() -> Schema:
    return Schema([
        OptionSchema(name="host", type=OptionType.STRING, default="localhost",
                     description="Interface to bind", mandatory=True),
        OptionSchema(name="ports", type=OptionType.UNSIGNED, is_list=True,
                     default="80, 443", description="Listening ports"),
        OptionSchema(name="debug", type=OptionType.BOOLEAN, default=False,
                     description="Verbose request logging"),
        OptionSchema(name="timeout", type=OptionType.FLOAT, default=30.0,
                     description="Request timeout in seconds"),
        OptionSchema(name="workers", type=OptionType.SIGNED, default=4,
                     description="Worker process count"),
    ])


def build_example_options() -> list:
    """
    Options as a parser would hand them over: raw text, typed on construction.

    `timeout` is given as a signed integer, so it fails the FLOAT entry.
    `theme` is not declared by the schema.
    """
    return [
        Option("host", "0.0.0.0"),
        Option("ports", ["80", "443", "8080"], OptionType.UNSIGNED),
        Option("debug", "yes", OptionType.BOOLEAN),
        Option("timeout", "30", OptionType.SIGNED),
        Option("workers", "0x10", OptionType.SIGNED),
        Option("theme", "dark"),
    ]
