"""
Group matching service package.

Assigns configuration profiles to machines. Collaborators load group
definitions and supply the attributes of each requesting machine; this
package validates groups, orders them by specificity and picks the group
that applies.

- app.groups: Group model, matcher, specificity order and selection.

Guidelines:
- Everything here is stateless apart from GroupCatalog; storage and
  transport live with the callers.
- Keep selection deterministic: the same catalog and attributes always
  pick the same group.
"""
