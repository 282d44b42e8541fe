# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os

from traitlets import Enum, Integer, Bool, HasTraits, List, TraitError
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .formatters import formatters


CONFIG_BASENAME = 'jsondelta_config'


class JsondeltaConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def config_path():
    """The directories searched for config files, in descending priority."""
    return [
        os.getcwd(),
        os.path.join(os.path.expanduser('~'), '.jsondelta'),
    ]


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def build_config(entrypoint, include_none=False):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    for c in _load_config_files(CONFIG_BASENAME, path=config_path()):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, JsondeltaConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(JsondeltaConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class IgnorePaths(List):

    def validate_elements(self, obj, value):
        value = super(IgnorePaths, self).validate_elements(obj, value)
        for path in value:
            if not isinstance(path, str) or not path.strip('/.'):
                raise TraitError(
                    'ignore paths need to be non-empty strings like "/a/b" or "a.b", '
                    'got %r' % (path,))
        return value


class Diff(Global):

    format = Enum(
        sorted(formatters),
        'new',
        help="How to show changed values: the new value, the old value, or both.",
    ).tag(config=True)

    ignore = IgnorePaths(
        default_value=[],
        help="Paths to leave out of the diff, on the form /a/b or a.b.",
    ).tag(config=True)

    indent = Integer(
        None,
        allow_none=True,
        help="Indentation of the json output. Compact output when unset.",
    ).tag(config=True)

    color = Bool(
        True,
        help="Whether to use colors in pretty printed output.",
    ).tag(config=True)


class JsonDelta(Diff):
    pass


entrypoint_configurables = {
    'jsondelta': JsonDelta,
}
