import pytest
from PIL import Image

from photolog.errors import ImageError
from photolog.images import ImageStatus, process_images, resize_image
from photolog.posts import Post, PostIndex

from conftest import make_jpeg


def test_resize_keeps_aspect_ratio(tmp_path):
    src = make_jpeg(tmp_path / "src.jpg", size=(3000, 2000))
    dst = tmp_path / "dst.jpg"
    resize_image(src, dst)
    with Image.open(dst) as img:
        assert img.format == "JPEG"
        assert img.size == (1440, 960)


def test_resize_converts_to_rgb(tmp_path):
    src = tmp_path / "src.jpeg"
    Image.new("L", (720, 100), 128).save(src, "JPEG")
    dst = tmp_path / "dst.jpg"
    resize_image(src, dst)
    with Image.open(dst) as img:
        assert img.mode == "RGB"
        assert img.size == (1440, 200)


def test_resize_missing_source(tmp_path):
    with pytest.raises(ImageError, match="Error opening source image"):
        resize_image(tmp_path / "missing.jpg", tmp_path / "dst.jpg")


def test_resize_corrupt_source(tmp_path):
    src = tmp_path / "bad.jpg"
    src.write_bytes(b"definitely not a jpeg")
    with pytest.raises(ImageError, match="Error decoding image"):
        resize_image(src, tmp_path / "dst.jpg")
    assert not (tmp_path / "dst.jpg").exists()


def test_process_images_continues_past_failures(tmp_path):
    src_dir = tmp_path / "images"
    out_dir = tmp_path / "public" / "images"
    make_jpeg(src_dir / "a.jpg")
    (src_dir / "bad.jpg").write_bytes(b"garbage")
    make_jpeg(src_dir / "c.jpg")
    index = PostIndex([
        Post("A", "", "a.jpg"),
        Post("Bad", "", "bad.jpg"),
        Post("Gone", "", "gone.jpg"),
        Post("C", "", "c.jpg"),
    ])

    outcomes = process_images(index, src_dir, out_dir)

    assert [o.status for o in outcomes] == [
        ImageStatus.WRITTEN, ImageStatus.FAILED, ImageStatus.FAILED, ImageStatus.WRITTEN,
    ]
    assert "bad.jpg" in outcomes[1].message
    assert sorted(p.name for p in out_dir.iterdir()) == ["a.jpg", "c.jpg"]


def test_process_images_never_overwrites(tmp_path):
    src_dir = tmp_path / "images"
    out_dir = tmp_path / "out"
    make_jpeg(src_dir / "a.jpg", color=(0, 0, 255))
    out_dir.mkdir()
    (out_dir / "a.jpg").write_bytes(b"already here")

    outcomes = process_images(PostIndex([Post("A", "", "a.jpg")]), src_dir, out_dir)

    assert outcomes[0].status is ImageStatus.SKIPPED
    assert (out_dir / "a.jpg").read_bytes() == b"already here"


def test_process_images_uses_base_name_for_destination(tmp_path):
    src_dir = tmp_path / "images"
    out_dir = tmp_path / "out"
    make_jpeg(src_dir / "2024" / "trip.jpg")

    outcomes = process_images(PostIndex([Post("Trip", "", "2024/trip.jpg")]), src_dir, out_dir)

    assert outcomes[0].status is ImageStatus.WRITTEN
    assert outcomes[0].destination == out_dir / "trip.jpg"
    assert (out_dir / "trip.jpg").exists()


def test_process_images_post_without_image(tmp_path):
    outcomes = process_images(PostIndex([Post("Text only", "", "")]), tmp_path, tmp_path / "out")
    assert outcomes[0].status is ImageStatus.FAILED


def test_oversized_image_is_skipped(tmp_path, monkeypatch):
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
    src_dir = tmp_path / "images"
    out_dir = tmp_path / "out"
    make_jpeg(src_dir / "big.jpg", size=(200, 200))
    make_jpeg(src_dir / "small.jpg", size=(10, 10))
    index = PostIndex([Post("Big", "", "big.jpg"), Post("Small", "", "small.jpg")])

    outcomes = process_images(index, src_dir, out_dir)

    assert [o.status for o in outcomes] == [ImageStatus.FAILED, ImageStatus.WRITTEN]
    assert "Error decoding image" in outcomes[0].message


def test_unreadable_source_is_an_open_error(tmp_path):
    (tmp_path / "dir.jpg").mkdir()
    with pytest.raises(ImageError, match="Error opening source image"):
        resize_image(tmp_path / "dir.jpg", tmp_path / "dst.jpg")
