"""Validators and Required Flags

Validators are called with the coerced value and reject it by raising. Required
flags make parsing fail when they are missing.

Usage:

    python ./02_validators.py --port=8080
    python ./02_validators.py --port=80
    python ./02_validators.py
"""

import flags


def check_port(port: int) -> None:
    if not 1024 <= port <= 65535:
        raise ValueError(f"port must be between 1024 and 65535, got {port}")


flags.define_integer("port").set_description("Port to listen on.").set_validator(
    check_port
).set_required()
flags.define_string("api-key", "").set_secret()

if __name__ == "__main__":
    flags.set_usage_info("Usage: 02_validators.py --port=PORT")
    flags.parse()
    print(flags.FLAGS.values_dict())
