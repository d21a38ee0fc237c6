""" Command line interfaces. """
