"""
Core services.

- users: Identity store (registration, lookup, credentials, profile)
- jobs: Job postings and job search
- applications: Applications and their ownership rules
- saved_jobs: Seeker bookmarks
- messages: Conversations and message delivery/read state
"""
