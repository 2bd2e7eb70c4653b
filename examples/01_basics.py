"""Basics

Flags are declared up front, parsed once, then read back by name.

Usage:

    python ./01_basics.py --help
    python ./01_basics.py --name='Dan Pupius' --age=31 --height=1.85 \
        --pets=Ada,Oscar --hobby=triathlon --hobby=photography
    python ./01_basics.py --name Dan --noverbose -- trailing arguments
"""

import flags

flags.define_string("name", "Billy Noone", "Your name")
flags.define_integer("age", 21, "Your age in whole years")
flags.define_number("height", 1.80, "Your height in meters")
flags.define_string_list("pets", [], "Comma separated list of your pets")
flags.define_multi_string("hobby", [], "A hobby")
flags.define_boolean("verbose", True, "Print the help text after the summary")

if __name__ == "__main__":
    rest = flags.parse()

    print("Name :", flags.get("name"))
    print("Age :", flags.get("age"))
    print("Height :", flags.get("height"))
    print("Pets :", ", ".join(flags.get("pets")))
    print("Hobbies :", *flags.get("hobby"), sep="\n  ")
    print("Trailing :", rest)

    if flags.get("verbose"):
        print("\nHelp Text:")
        flags.help()
