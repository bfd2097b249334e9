"""
Feature modules for the Gatehouse backend.

- profiles: signup, e-mail confirmation, profile updates and deactivation,
  plus the credential store and password hashing they rely on.
- sessions: log-on, session tokens and log-out.

Sessions depend on profiles only through profiles.interfaces; concrete
classes are chosen in api.dependencies.
"""
