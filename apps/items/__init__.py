"""Items app package.

The item catalog: owners list things they are willing to lend, other
users search for them, book them and, after a finished booking, leave
comments. Owners viewing their own items see the previous and the
upcoming approved booking.
"""
