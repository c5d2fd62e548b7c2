from string import Template

#### Meeting Summarizer ####

system_prompt = Template(" ".join([
    "You are a professional meeting summarizer.",
    "Provide clear, structured summaries based on the user's specific instructions.",
]))

footer_prompt = Template("\n".join([
    'Please summarize the following meeting transcript according to these instructions: "$instruction"',
    "",
    "Transcript:",
    "$transcript",
    "",
    "Summary:",
]))
