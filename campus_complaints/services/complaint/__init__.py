"""
Complaint service layer.

Provides the business logic of the complaint core:

- **Lifecycle**: status state machine with admin-only transitions
- **Deadlines**: urgency classification against an injected ``now``
- **Search**: free-text and status filtering of fetched complaints
- **Analytics**: dashboard counts and resolution rate
- **Facade**: session-scoped submission, listing and status changes
"""
