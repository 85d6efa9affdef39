"""
Service layer abstraction.

Services encapsulate business logic and receive their repositories at
construction time, so API handlers never talk to storage directly.
"""
