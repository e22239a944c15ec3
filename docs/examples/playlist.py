import extraseq


def read_tracks(lines):
    for line in lines:
        line = line.strip()
        if line and not line.startswith('#'):
            yield line


playlist = """
# morning
intro.ogg
theme.ogg
outro.ogg
""".splitlines()

# the generator is consumed once, further loops replay a buffered copy
for track in extraseq.repeat(read_tracks(playlist), 2):
    print("playing", track)

# shuffle buttons: jump around without falling off the list
for offset in [-1, 4, 10]:
    print(offset, "cyclic:",
          extraseq.element_at(read_tracks(playlist), offset, "cyclic"),
          "clamp:",
          extraseq.element_at(read_tracks(playlist), offset, "clamp"))
