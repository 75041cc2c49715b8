"""
Forum Backend — Services Layer
================================

What:  Business rules between routes (HTTP) and the store (SQLAlchemy).
How:   Stateless service objects; the AsyncSession is passed into every call.

Service Inventory:
    - checks:               required-field and existence guards
    - PostService:          timeline read, post creation
    - SubscriptionService:  subscribe, list subscriptions
    - UpvoteService:        one upvote per user per post
    - ProfileService:       subscriptions + upvotes received
    - CommentService:       add / list comments
"""
