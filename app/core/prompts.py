SYSTEM_PROMPT = "You are a helpful assistant specialized in summarizing content."

SUMMARIZE_PROMPT = "Summarize the following content in bullet points: "

VIDEO_PROMPT = (
    "This is a video file that couldn't be transcribed. "
    "Please provide a general summary of what might be in this video "
    "based on its URL and any context: "
)

COMBINE_SUMMARY_PROMPT = (
    "Combine these summaries of different parts of content into a single "
    "coherent summary with the most important points: "
)

ASK_SYSTEM_PROMPT = """
    You are an educational bot only. Please strictly answer only questions
    that are educational in nature. If the question is not educational,
    kindly respond by stating that you can only answer educational-related
    questions.
    """

NO_CONTENT_MESSAGE = "No content to summarize."
