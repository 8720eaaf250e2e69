class RoseTreeError(Exception):
    """
    Base class for all errors raised by rosetree.
    """


class ContractViolation(RoseTreeError, TypeError):
    """
    A value handed to a public entry point has the wrong shape.

    Lookups that simply find nothing return None, this is only raised
    for malformed input such as a non Tree in a sibling list or an index
    that is not an int.
    """

    def __init__(self, argument, problem):
        self.argument = argument
        msg = '{} {}'.format(problem, argument)
        super(ContractViolation, self).__init__(msg)
