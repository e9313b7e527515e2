# vidscout

A small command-line tool that finds the media behind a web page and
downloads it. It knows a handful of sites. For any other address it
downloads the address directly as a plain file.

Sites with their own extractor (`vidscout.extractors`):

- Tumblr (`tumblr`): images and videos of a post
- udn (`udn`): news videos
- Vimeo (`vimeo`): progressive streams
- XVIDEOS (`xvideos`): low and high quality streams
- Yinyuetai (`yinyuetai`): music videos
- Youku (`youku`)
- anything else (`universal`): the URL is fetched as a single file. The
  name and extension come from the URL, or from the Content-Type when the
  path has no extension.

When a stream is made of several parts, each part is downloaded and the
parts are joined into one MP4 with `ffmpeg`. For that, `ffmpeg` has to be
on your `PATH`.

## Installation

```
pip install .
```

## Command-line use

Download one or more URLs:

```
vidscout https://vimeo.com/254865724
```

If you do not choose a stream, vidscout downloads the largest one. A file
that already exists with the expected size is not downloaded again.

Show the site, title, type and chosen stream without downloading:

```
vidscout -i https://vimeo.com/254865724
```

Print the extracted data as JSON:

```
vidscout -j https://vimeo.com/254865724
```

Read the URLs from a file, one per line:

```
vidscout -F urls.txt
```

Other options:

- `-c COOKIE` sends a cookie with every request. The value may also be the
  path of a file that holds the cookie. Cookies in the Netscape
  `cookies.txt` format are turned into a `Cookie` header. Any other text is
  sent as it is.
- `-r REFERER` uses the given Referer header for every request.
- `-f STREAM` picks a stream by its key, as shown by `-i`.
- `-o DIR` sets the output directory, which must already exist. `-O NAME`
  sets the output file name.
- `-cs N` sets the download chunk size in MB. The default is 1 MB.
- `-start N`, `-end N` and `-items 1,5,6,8-10` select which lines of the
  URL file given with `-F` are used. Lines are counted from 1.
- `-retry N` sets how many times a request is attempted before it fails.
  The default is 10.
- `-ccode`, `-ckey` and `-password` set the values sent to Youku.
- `-d` prints the URL, method, headers and status of every request.
- `-v` prints the version.

When any URL fails, the error is printed and the command exits with
status 1.

## Library use

Each extractor has an `extract(url, client)` function. It returns a list
of `vidscout.models.Media` records. Each record holds the site, the title,
the media type and a dict of `Stream` objects, and each stream holds its
`MediaURL` parts.

```python
from vidscout.config import Options
from vidscout.request import HttpClient
from vidscout.extractors import vimeo

client = HttpClient(Options())
for media in vimeo.extract("https://vimeo.com/254865724", client):
    print(media.to_dict())
```

Other useful pieces:

- `vidscout.request.HttpClient`: requests with retries, cookies and referer
  handling (`get`, `get_bytes`, `headers`, `size`, `content_type`).
- `vidscout.ffmpeg`: `merge_to_mp4` and `merge_audio_and_video`.
- `vidscout.utils`: matching, file naming and item selection helpers.
- `vidscout.pool.WaitGroupPool`: a wait group that limits how many workers
  run at once.

## What it does not do

- Downloads run one part at a time. The options `-m` and `-n` are accepted
  but do not start parallel downloads.
- `-aria2`, `-aria2token`, `-aria2addr` and `-aria2method` are accepted but
  nothing is sent to aria2.
- `-p` (playlists), `-C` (captions) and `-eto` are accepted but have no
  effect.
- There is no extractor for YouTube or bilibili. `av…`/`ep…` short links
  are expanded to bilibili addresses, which are then handled by the direct
  download fallback.
- There is no progress bar.

## Running the tests

```
pip install .[test]
pytest
```