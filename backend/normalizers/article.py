from typing import Any, Dict

from backend.models.values import (
    PropertyKind,
    first_object,
    kind_of,
    name_of,
    text_of,
    url_of,
)
from backend.normalizers.common import derive


def normalize_article(data: Dict[str, Any]) -> None:
    """
    Article / BlogPosting: word count, author, publisher, images.
    """
    body = data.get("articleBody")

    if kind_of(body) is not PropertyKind.ABSENT and body != "":
        derive(data, "wordCount", len(text_of(body).split()))

    _flatten_author(data)
    _flatten_publisher(data)
    _flatten_images(data)


def _flatten_author(data: Dict[str, Any]) -> None:
    author = data.get("author")
    obj = first_object(author)

    if obj is None:
        derive(data, "authorName", name_of(author))
        return

    derive(data, "authorName", obj.get("name"))
    derive(data, "authorType", obj.get("@type") or "Person")
    derive(data, "authorUrl", obj.get("url"))


def _flatten_publisher(data: Dict[str, Any]) -> None:
    publisher = data.get("publisher")
    obj = first_object(publisher)

    if obj is None:
        derive(data, "publisherName", name_of(publisher))
        return

    derive(data, "publisherName", obj.get("name"))
    derive(data, "publisherLogo", url_of(obj.get("logo") or obj.get("image")))
    derive(data, "publisherUrl", obj.get("url"))
    derive(data, "publisherType", obj.get("@type") or "Organization")


def _flatten_images(data: Dict[str, Any]) -> None:
    image = data.get("image")
    kind = kind_of(image)

    if kind is PropertyKind.SEQUENCE:
        gallery = [url for url in (url_of(img) for img in image) if url]
        if gallery:
            derive(data, "imageGallery", gallery)
            derive(data, "featuredImage", gallery[0])
        return

    if kind is not PropertyKind.ABSENT:
        derive(data, "featuredImage", url_of(image))
