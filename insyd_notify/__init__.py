"""insyd-notify: posts, likes and a polled notification feed."""
