"""
Copyright (c) 2019 The MITRE Corporation.
"""
import os
import logging

__all__ = ['logging_config', 'get_level']

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def get_level(ll):
    if isinstance(ll, int):
        return ll
    log_level = ll.lower()
    if log_level == 'info':
        return logging.INFO
    elif log_level == 'debug':
        return logging.DEBUG
    elif log_level == 'error':
        return logging.ERROR
    elif log_level in ('warning', 'warn'):
        return logging.WARNING
    else:
        return logging.INFO

def logging_config(folder=None, name='csv2json',
                   level='info',
                   console_level=None,
                   no_console=False):
    """ Config the logging.

    Parameters
    ----------
    folder : str or None
        Directory for the log file. No log file is written when None.
    name : str
        Base name of the log file (``<name>.log``).
    level : int or str
    console_level : int or str or None
        Defaults to ``level``.
    no_console: bool
        Whether to disable the console log (written to stderr)
    Returns
    -------
    logpath : str or None
        Path of the log file, if one was configured.
    """
    # Remove all the current handlers
    for handler in list(logging.root.handlers):
        logging.root.removeHandler(handler)
    log_level = get_level(level)
    console_level = log_level if console_level is None else get_level(console_level)
    logging.root.setLevel(min(log_level, console_level))
    formatter = logging.Formatter(LOG_FORMAT)
    logpath = None
    if folder is not None:
        if not os.path.exists(folder):
            os.makedirs(folder)
        logpath = os.path.join(folder, name + '.log')
        logfile = logging.FileHandler(logpath)
        logfile.setLevel(log_level)
        logfile.setFormatter(formatter)
        logging.root.addHandler(logfile)
    if not no_console:
        logconsole = logging.StreamHandler()
        logconsole.setLevel(console_level)
        logconsole.setFormatter(formatter)
        logging.root.addHandler(logconsole)
    return logpath
