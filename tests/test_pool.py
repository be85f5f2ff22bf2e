from exkit.pool import (
    BufferPool,
    get_buff64,
    get_buff128,
    get_buff512,
    get_buff1024,
    get_buff2048,
    get_buff4096,
    get_buff8192,
)


def _check_shared(p1, p2, size):
    assert p1 is p2
    assert p1.size == size

    buf = p1.get()
    assert buf.getvalue() == b""
    buf.write(b"xx")
    assert buf.getvalue() == b"xx"
    p1.put(buf)


def test_get_buff64():
    _check_shared(get_buff64(), get_buff64(), 64)


def test_get_buff128():
    _check_shared(get_buff128(), get_buff128(), 128)


def test_get_buff512():
    _check_shared(get_buff512(), get_buff512(), 512)


def test_get_buff1024():
    _check_shared(get_buff1024(), get_buff1024(), 1024)


def test_get_buff2048():
    _check_shared(get_buff2048(), get_buff2048(), 2048)


def test_get_buff4096():
    _check_shared(get_buff4096(), get_buff4096(), 4096)


def test_get_buff8192():
    _check_shared(get_buff8192(), get_buff8192(), 8192)


def test_pools_of_different_sizes_are_distinct():
    assert get_buff64() is not get_buff128()
    assert get_buff64().size != get_buff128().size


def test_get_returns_reset_buffer():
    p = get_buff64()
    buf = p.get()
    buf.write(b"xx")
    assert buf.getvalue() == b"xx"
    p.put(buf)

    again = p.get()
    assert again.getvalue() == b""
    assert again.tell() == 0


def test_put_makes_buffer_reusable():
    p = BufferPool(64)
    buf = p.get()
    buf.write(b"xx")
    p.put(buf)

    reused = p.get()
    assert reused is buf
    assert reused.getvalue() == b""


def test_get_creates_new_buffer_when_empty():
    p = BufferPool(16)
    first = p.get()
    second = p.get()
    assert first is not second