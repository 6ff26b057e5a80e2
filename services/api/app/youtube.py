import logging
from xml.etree.ElementTree import ParseError
from youtube_transcript_api import (
    CouldNotRetrieveTranscript,
    NoTranscriptFound,
    TranscriptsDisabled,
    VideoUnavailable,
    YouTubeTranscriptApi,
)

from app.errors import ExtractionFailed

logger = logging.getLogger(__name__)

CAPTIONS_MISSING = (
    "Failed to fetch YouTube transcript. Please check if the video has closed captions enabled."
)
EMPTY_RESPONSE = (
    "YouTube returned an empty transcript response. Try again later or paste the transcript."
)


def _pick_transcript(transcript_list):
    # Prefer English, but fall back to any available track (manual or generated),
    # and auto-translate to English if needed.
    try:
        return transcript_list.find_manually_created_transcript(["en"])
    except NoTranscriptFound:
        pass
    try:
        return transcript_list.find_generated_transcript(["en"])
    except NoTranscriptFound:
        pass

    available = list(transcript_list)
    if not available:
        return None
    transcript = available[0]
    if not transcript.language_code.startswith("en") and transcript.is_translatable:
        transcript = transcript.translate("en")
    return transcript


def fetch_youtube_transcript(video_id: str) -> str:
    """Return the caption text of a video, segments joined with single spaces.

    Raises:
        ExtractionFailed: If the video has no captions or the fetch fails.
    """
    try:
        transcript_list = YouTubeTranscriptApi().list(video_id)
        transcript = _pick_transcript(transcript_list)
        if transcript is None:
            raise ExtractionFailed(CAPTIONS_MISSING)
        parts = transcript.fetch()
        return " ".join(p.text for p in parts if p.text).strip()
    except ExtractionFailed:
        raise
    except (TranscriptsDisabled, NoTranscriptFound, VideoUnavailable) as e:
        logger.info("No transcript for video_id=%s reason=%s", video_id, e.__class__.__name__)
        raise ExtractionFailed(CAPTIONS_MISSING) from e
    except CouldNotRetrieveTranscript as e:
        logger.exception(
            "Transcript fetch failed for video_id=%s err_type=%s",
            video_id,
            e.__class__.__name__,
        )
        raise ExtractionFailed(CAPTIONS_MISSING) from e
    except ParseError as e:
        # YouTube sometimes answers the caption request with an empty body
        logger.exception("Transcript response unparseable for video_id=%s", video_id)
        raise ExtractionFailed(EMPTY_RESPONSE, status_code=500) from e
    except Exception as e:
        cause = getattr(e, "__cause__", None)
        logger.exception(
            "Transcript fetch failed for video_id=%s err_type=%s cause_type=%s",
            video_id,
            e.__class__.__name__,
            cause.__class__.__name__ if cause else None,
        )
        raise ExtractionFailed(CAPTIONS_MISSING, status_code=500) from e
