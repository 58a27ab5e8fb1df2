"""Remote data and caching services package.

Contains clients for the GitHub API and the skills endpoint together with the
process-wide cache that memoizes their results.
"""
