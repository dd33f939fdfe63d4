"""
Data models for netpromoter.

- Rating: validated 0-10 score
- Classification: Detractor / Passive / Promoter segment
- Response: respondent id paired with a Rating
"""
