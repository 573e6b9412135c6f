"""
Service layer.

``IssueStore`` owns the issue collection and delegates every status
and assignee decision to ``transition_policy``.  ``UserDirectory`` is
the fixed lookup table of users issues can be assigned to.
"""
