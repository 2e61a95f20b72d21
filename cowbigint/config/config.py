
class Config(object):
    """Values for the options of an OptionDescription; groups are nested
    Config objects.  Assignments are validated by the option."""

    def __init__(self, descr, **overrides):
        self._descr = descr
        self._build(overrides)

    def _build(self, overrides):
        for child in self._descr._children:
            if isinstance(child, Option):
                self.__dict__[child._name] = child.default
            elif isinstance(child, OptionDescription):
                self.__dict__[child._name] = Config(child)
        for path, value in overrides.items():
            subconfig, name = self._get_by_path(path)
            setattr(subconfig, name, value)

    def __setattr__(self, name, value):
        if name.startswith('_'):
            self.__dict__[name] = value
            return
        self.setoption(name, value)

    def setoption(self, name, value):
        if name not in self.__dict__:
            raise ValueError('unknown option %s' % (name,))
        child = getattr(self._descr, name)
        if isinstance(child, OptionDescription):
            raise ValueError('%s is an option group, not an option' % (name,))
        child.setoption(self, value)

    def _get_by_path(self, path):
        """returns tuple (config, name)"""
        path = path.split('.')
        for step in path[:-1]:
            if not isinstance(self.__dict__.get(step), Config):
                raise ValueError('unknown option group %s' % (step,))
            self = getattr(self, step)
        return self, path[-1]


class Option(object):
    def __init__(self, name, doc):
        self._name = name
        self.doc = doc

    def validate(self, value):
        raise NotImplementedError('abstract base class')

    def setoption(self, config, value):
        name = self._name
        if not self.validate(value):
            raise ValueError('invalid value %s for option %s' % (value, name))
        config.__dict__[name] = value

class ChoiceOption(Option):
    def __init__(self, name, doc, values, default):
        super(ChoiceOption, self).__init__(name, doc)
        self.values = values
        self.default = default

    def validate(self, value):
        return value in self.values

class BoolOption(ChoiceOption):
    def __init__(self, name, doc, default=True):
        super(BoolOption, self).__init__(name, doc, [True, False], default)

    def validate(self, value):
        return value is True or value is False

class IntOption(Option):
    def __init__(self, name, doc, default=0, min=None):
        super(IntOption, self).__init__(name, doc)
        self.default = default
        self.min = min

    def validate(self, value):
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return self.min is None or value >= self.min

class OptionDescription(object):
    def __init__(self, name, doc, children):
        self._name = name
        self.doc = doc
        self._children = children
        self._build()

    def _build(self):
        for child in self._children:
            setattr(self, child._name, child)
