"""GraphQL document for resolving a commit-ish expression to commit metadata."""

from __future__ import annotations

import dataclasses
import typing as typ

COMMIT_QUERY = """
query($owner: String!, $name: String!, $expression: String!) {
  repository(owner: $owner, name: $name) {
    object(expression: $expression) {
      ... on Commit {
        messageHeadline
        abbreviatedOid
        changedFiles
        commitUrl
        pushedDate
        author {
          avatarUrl
          name
          user {
            login
            avatarUrl
            url
          }
        }
      }
    }
  }
}
"""


@dataclasses.dataclass(frozen=True, slots=True)
class GraphQLQuery:
    """A GraphQL document paired with its bound variables."""

    document: str
    variables: dict[str, typ.Any]

    def payload(self) -> dict[str, typ.Any]:
        """Return the JSON request body for the GraphQL endpoint."""
        return {"query": self.document, "variables": dict(self.variables)}


def build_commit_query(owner: str, repository: str, expression: str) -> GraphQLQuery:
    """Build the commit lookup query.

    The inputs travel as GraphQL variables, so quotes or braces in an
    expression cannot alter the document.

    Examples
    --------
    >>> query = build_commit_query("acme", "widgets", "main")
    >>> query.variables
    {'owner': 'acme', 'name': 'widgets', 'expression': 'main'}

    """
    return GraphQLQuery(
        document=COMMIT_QUERY,
        variables={"owner": owner, "name": repository, "expression": expression},
    )
