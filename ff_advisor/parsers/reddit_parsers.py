"""Parsers for Reddit listing responses."""

from typing import Any, Dict, List


def parse_listing(data: Any, base_url: str = "https://www.reddit.com") -> List[Dict[str, Any]]:
    """Flatten a ``{data: {children: [{data: {...}}]}}`` envelope into post records.

    Args:
        data: Raw listing JSON from hot/top/search endpoints
        base_url: Prefix for permalinks

    Returns:
        List of post dictionaries; empty when the envelope is missing or malformed
    """
    if not isinstance(data, dict):
        return []
    children = (data.get("data") or {}).get("children")
    if not isinstance(children, list):
        return []

    posts: List[Dict[str, Any]] = []
    for child in children:
        if not isinstance(child, dict) or not isinstance(child.get("data"), dict):
            continue
        post = child["data"]
        permalink = post.get("permalink")
        posts.append(
            {
                "id": post.get("id"),
                "title": post.get("title") or "",
                "author": post.get("author"),
                "score": post.get("score") or 0,
                "upvote_ratio": post.get("upvote_ratio"),
                "num_comments": post.get("num_comments") or 0,
                "created_utc": post.get("created_utc"),
                "url": f"{base_url}{permalink}" if permalink else post.get("url"),
                "selftext": post.get("selftext") or "",
                "link_flair_text": post.get("link_flair_text"),
            }
        )
    return posts


def parse_comment_listing(data: Any) -> List[Dict[str, Any]]:
    """Flatten a comment listing, including nested replies, depth first."""
    comments: List[Dict[str, Any]] = []

    def _walk(listing: Any) -> None:
        if not isinstance(listing, dict):
            return
        children = (listing.get("data") or {}).get("children") or []
        for child in children:
            # t1 = comment; "more" stubs are skipped
            if not isinstance(child, dict) or child.get("kind") != "t1":
                continue
            comment = child.get("data") or {}
            comments.append(
                {
                    "id": comment.get("id"),
                    "author": comment.get("author"),
                    "body": comment.get("body") or "",
                    "score": comment.get("score") or 0,
                    "created_utc": comment.get("created_utc"),
                    "parent_id": comment.get("parent_id"),
                }
            )
            # Empty replies come back as "" rather than a listing
            _walk(comment.get("replies"))

    _walk(data)
    return comments
