# Services package.
#
# Each module exposes a focused set of async functions that encapsulate
# data access for a single domain aggregate:
#
#   comment_service: list / create / update / delete for Comment, plus
#                    the Blog comment counter
#
# All service functions accept an AsyncSession as their first argument
# and never commit: the router layer owns the transaction boundary and
# commits before it answers.
