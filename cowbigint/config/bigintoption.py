from cowbigint.config.config import OptionDescription, BoolOption, IntOption
from cowbigint.config.config import ChoiceOption, Config

bigint_optiondescription = OptionDescription("bigint", "cowbigint options", [
    OptionDescription("storage", "Limb storage options", [
        IntOption("inline_capacity",
                  "maximum number of limbs kept inline, without a buffer",
                  default=2, min=0),
        BoolOption("eager_promotion",
                   "move inline limbs to a shared buffer on every write, "
                   "copy and assignment",
                   default=False),
        BoolOption("track_stats",
                   "count buffer allocations, copies and frees",
                   default=True),
        ]),
    ChoiceOption("log", "what to print on stderr",
                 ["quiet", "info", "debug"], "quiet"),
    ])


def get_bigint_config(**overrides):
    """Return a fresh Config with the defaults, changed by 'overrides'
    (dotted paths, e.g. get_bigint_config(**{'storage.eager_promotion':
    True}))."""
    return Config(bigint_optiondescription, **overrides)
